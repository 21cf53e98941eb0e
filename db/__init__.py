"""
db/ - Database Layer
====================
Handles PostgreSQL connections and exposes the `Db` connection handle
that factories own and DAOs run their transactions on.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
