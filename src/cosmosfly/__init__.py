"""cosmosfly: declarative Azure Cosmos DB bindings."""

from cosmosfly.bindings import RETURN_VALUE, BindingResolver, CosmosDB, cosmos_db, get_bindings

__version__ = "0.1.0"

__all__ = [
    "RETURN_VALUE",
    "BindingResolver",
    "CosmosDB",
    "cosmos_db",
    "get_bindings",
]
