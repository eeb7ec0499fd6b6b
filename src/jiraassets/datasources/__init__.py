from .object_schema import ObjectSchemaDataSource

__all__: list[str] = ["ObjectSchemaDataSource"]
