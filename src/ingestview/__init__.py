"""ingestview - interactive document ingestion for a search index console."""

from .core.config import Config
from .gateway import HTTPIndexGateway, IndexGateway
from .workflow import IngestionController

__version__ = "1.0.0"

__all__ = ["Config", "HTTPIndexGateway", "IndexGateway", "IngestionController", "__version__"]
