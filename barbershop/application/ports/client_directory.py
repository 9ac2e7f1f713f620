from abc import ABC, abstractmethod


class ClientDirectoryPort(ABC):
    @abstractmethod
    def client_exists(self, client_id: str) -> bool:
        raise NotImplementedError
