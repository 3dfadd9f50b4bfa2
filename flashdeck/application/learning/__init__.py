"""
Learning bounded context - Application layer.

Contains the services for category, study session and flashcard management:
- Validation of incoming requests
- Referential checks between the three entities
- Translation of absence and conflicts into Flashdeck errors
"""
