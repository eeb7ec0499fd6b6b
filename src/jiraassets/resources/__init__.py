from .object_resource import ObjectResource

__all__: list[str] = ["ObjectResource"]
