"""
Writers for the Swagger 2.0 dialect

https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md
"""
