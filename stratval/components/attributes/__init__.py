from .attributes import Attribute, AttributeType, NominalAttribute, NumericAttribute

__all__ = ["Attribute", "AttributeType", "NominalAttribute", "NumericAttribute"]
