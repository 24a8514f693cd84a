"""Constants for Person model field names"""

class PersonFields:
    """Field name constants for Person model"""
    ID = "id"
    NAME = "name"
    CPF = "cpf"
    ADDRESS = "address"
