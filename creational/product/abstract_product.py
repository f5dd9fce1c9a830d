from abc import ABC, abstractmethod

# --- Abstract Products ---

class Transport(ABC):
    @abstractmethod
    def deliver(self) -> str: ...


class Chair(ABC):
    @abstractmethod
    def type(self) -> str: ...
