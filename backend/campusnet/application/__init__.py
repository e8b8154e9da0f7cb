"""
Application Layer - use cases as CQRS commands and queries.

- commands/: profile signup/update, domain creation, paper upload/delete,
  message send/mark-read
- queries/: profile, teacher directory, domain and paper listings, inbox
  and sent lists, signed download URLs
- dto/: pydantic models handed to the presentation layer
"""
