"""
Custom exceptions for Music Catalog

This module defines the exceptions raised by the catalog pipeline. Per-file
extraction problems are reported with ExtractionError and recovered locally;
everything else aborts the run.
"""

class MusicCatalogError(Exception):
    """Base exception for all Music Catalog errors"""
    
    def __init__(self, message: str, details: str = None, filepath: str = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.filepath = filepath
    
    def __str__(self):
        parts = [self.message]
        if self.filepath:
            parts.append(f"File: {self.filepath}")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " | ".join(parts)


class ProcessingError(MusicCatalogError):
    """Raised when the catalog run cannot continue"""
    pass


class ConfigurationError(MusicCatalogError):
    """Raised when catalog options are invalid"""
    pass


class ServiceError(MusicCatalogError):
    """Raised when a service operation fails"""
    
    def __init__(self, service_name: str, message: str, details: str = None, filepath: str = None):
        super().__init__(message, details, filepath)
        self.service_name = service_name
    
    def __str__(self):
        return f"[{self.service_name}] {super().__str__()}"


class ExtractionError(ServiceError):
    """Raised when embedded tags cannot be read from a file"""
    
    def __init__(self, message: str, details: str = None, filepath: str = None):
        super().__init__("TagExtraction", message, details, filepath)


class FileOperationError(ServiceError):
    """Raised when file operations fail"""
    
    def __init__(self, message: str, details: str = None, filepath: str = None):
        super().__init__("FileOperations", message, details, filepath)
