"""
Writers for the OpenAPI 3.0 dialect

https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md
"""
