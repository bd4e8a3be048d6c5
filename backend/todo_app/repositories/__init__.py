"""
Repositories package — ORM data access for accounts.

Convention:
    - One file per aggregate root (e.g., users.py)
    - All functions accept `AsyncSession` as the first argument
    - Use `flush()` internally; commit/rollback belongs to the caller
      (`session_scope` or a script's own session block)

Todo lists and todos are served by the strategies in
`todo_app.persistence` instead, since those must also work without
a database.
"""
