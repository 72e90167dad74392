"""
Feature modules for the retail audit console.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: Supabase table access
- service.py: Business logic implementation
- exceptions.py: Module-specific exceptions

Route handlers live under api/routes and talk to modules through their
interfaces, not concrete implementations.
"""
