"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CreateDomainCommand(Command[ResearchDomain]):
        teacher_id: UserId
        name: str

    class CreateDomainHandler(CommandHandler[ResearchDomain]):
        def __init__(self, domain_repository: ResearchDomainRepository):
            self._domain_repository = domain_repository

        async def execute(self, command: CreateDomainCommand) -> ResearchDomain:
            domain = ResearchDomain.create(command.teacher_id, command.name)
            await self._domain_repository.save(domain)
            return domain
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
