import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class DocumentStore:
    """Latest full text of every document the editor has told us about."""
    documents: dict[str, str] = field(default_factory=dict)

    def get(self, uri: str) -> str | None:
        return self.documents.get(uri)

    def set(self, uri: str, text: str) -> None:
        self.documents[uri] = text

    def remove(self, uri: str) -> None:
        self.documents.pop(uri, None)

    def __contains__(self, uri: str) -> bool:
        return uri in self.documents

    def __len__(self) -> int:
        return len(self.documents)


@dataclass
class ConnectionState:
    initialized: bool = False
    shutdown_requested: bool = False
    exit_code: int | None = None

    @property
    def exited(self) -> bool:
        return self.exit_code is not None

    def request_exit(self, code: int) -> None:
        if self.exit_code is None:
            logger.info(f"Exiting with code {code}")
            self.exit_code = code
