"""dagstore.

Relational storage for directed acyclic graphs: a collection of named graphs
(``dags``), their nodes (``nodes``) and the directed edges between them
(``edges``).

Core subpackages
----------------

- ``dagstore.core.database``:

  - SQLModel entities reproducing the three-table schema.
  - Async repositories for each table.
  - Engine and session management.

- ``dagstore.server``:

  - FastAPI application exposing create/list/lookup endpoints per table.

The package stores topology only. It performs no traversal, no cycle
detection and no cross-row consistency checks; every integrity decision is
left to the database engine and the constraints declared on the tables.
"""

__version__ = "0.1.0"
