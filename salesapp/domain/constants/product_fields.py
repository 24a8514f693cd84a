"""Constants for Product model field names"""

class ProductFields:
    """Field name constants for Product model"""
    ID = "id"
    NAME = "name"
    CODE = "code"
    VALUE = "value"
