"""userctl — Result-typed user store with a composable combinator algebra."""

__version__ = "0.1.0"
