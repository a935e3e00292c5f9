"""
Answers feature: store, schemas and HTTP routes. Answers are scoped by question.
"""
