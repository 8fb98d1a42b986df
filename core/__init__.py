"""
core
----

Core booking components:

- Reservation, SearchRequest, SearchResult & friends (`models`):
  Immutable inputs and outputs of the scheduler.

- SearchState:
  Encapsulate the reservation snapshot and the resolved rule parameters of one search.

- ConstraintManager:
  Register rule evaluators and apply them in a fixed sequence.

- CategoryTree, EntityException, ConfigurationStore:
  Category catalog, per-business overrides and the settings source.
"""
