"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on the
``IssueStore`` it is given.
"""
