"""File storage interface."""


class FileStorage:
    """Interface for storing uploaded media under public URLs."""

    async def upload(self, content: bytes, path: str, upsert: bool = True) -> str:
        """Store file bytes.

        Args:
            content: File bytes
            path: Storage path
            upsert: Overwrite an existing file at the same path

        Returns:
            Public URL of the stored file
        """
        raise NotImplementedError
