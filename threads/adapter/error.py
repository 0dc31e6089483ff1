"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class BackendError(AdapterError):
    """Backend service request failed."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class RecordNotFoundError(BackendError):
    """Record addressed by ID does not exist in its collection."""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"Record not found: {collection}/{record_id}", status_code=404)


class StorageError(BackendError):
    """File upload to backend storage failed."""

    pass
