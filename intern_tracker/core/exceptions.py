class InternTrackerError(Exception):
    """Base exception for all intern_tracker errors"""
    pass

class DuplicateRecordError(InternTrackerError):
    """
    A create/replace would leave two internships with the same company and role.
    Nothing has been mutated when this is raised.
    """
    pass

class RecordNotFoundError(InternTrackerError):
    """Delete/replace referenced an internship that is not in the book"""
    pass

class InvalidArgumentError(InternTrackerError, ValueError):
    """A required value (predicate, comparator, record, preferences...) was missing or malformed"""
    pass

class ConfigError(InternTrackerError):
    """Invalid or inconsistent config.json"""
    pass

class DataLoadingError(InternTrackerError):
    """Stored internship book / preferences could not be read or failed validation"""
    pass
