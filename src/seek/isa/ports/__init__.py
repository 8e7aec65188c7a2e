"""ISA graph ports (interfaces) module.

Ports define the contracts between the graph engine and the hosting
application: the domain objects it walks and the visibility predicate it
consults.
"""

from isa.ports.protocols import DomainObject
from shared_kernel.authorization.protocols import VisibilityPredicate

__all__ = ["DomainObject", "VisibilityPredicate"]
