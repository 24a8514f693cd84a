"""Constants for Order model field names"""

class OrderFields:
    """Field name constants for Order model"""
    ID = "id"
    PERSON_ID = "person_id"
    CREATED_AT = "created_at"
    PAYMENT_METHOD = "payment_method"
    STATUS = "status"
    ITEMS = "items"


class OrderItemFields:
    """Field name constants for embedded OrderItem documents"""
    ID = "id"
    PRODUCT_ID = "product_id"
    QUANTITY = "quantity"
    UNIT_PRICE = "unit_price"
