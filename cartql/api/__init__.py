# GraphQL API

from .schema import schema, CartQLSchema, Query, Mutation

__all__ = ["schema", "CartQLSchema", "Query", "Mutation"]
