"""Public URL construction for Supabase Storage objects."""

from platewise.config import Config, get_config


class StorageUrlResolver:
    """Builds public object URLs. Performs no network I/O."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or get_config()

    def get_public_url(self, bucket: str, key: str) -> str:
        """Return the public URL for an object.

        Args:
            bucket: Storage bucket name
            key: Object key within the bucket

        Returns:
            Publicly dereferenceable URL string
        """
        path = "/".join(part for part in key.split("/") if part)
        return f"{self.config.supabase_url}/storage/v1/object/public/{bucket}/{path}"
