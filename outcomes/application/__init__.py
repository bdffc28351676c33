"""Application layer: safe constructors built on the domain monads."""
