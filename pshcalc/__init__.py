"""pshcalc: exhaustive enumeration of finite algebraic structures with law checking.

Core pieces, leaves first:

- **Arena**: append-only digit/bound storage shared by all coordinates of a session.
- **Odometer**: mixed-radix counter behind every generator.
- **Sets**: flat sets, products and hom-sets, each with a restartable arena-backed cursor.
- **Category / Presheaf sets**: validated cursors that skip candidates failing their laws.
- **Laws**: associativity, identity, well-definedness and functoriality checkers.
- **Semigroup**: arena-free associativity test for plain binary tables.
"""

__all__ = [
    "arena",
    "odometer",
    "views",
    "cursors",
    "sets",
    "laws",
    "category",
    "presheaf",
    "semigroup",
    "quiver",
    "config",
]
