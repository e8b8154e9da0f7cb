"""Research domain commands."""

from .create_domain import CreateDomainCommand, CreateDomainHandler

__all__ = ["CreateDomainCommand", "CreateDomainHandler"]
