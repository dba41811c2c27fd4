"""Building blocks for a cloud-storage shell: argument parsing, a hash table, lenient JSON, error messages, local file helpers and a write cache."""

__version__ = "0.2.6"

__all__ = ["args", "errmsg", "hashtable", "jsoncodec", "jsonnode", "localfs", "writecache"]