"""REST client for the translation-management server.

Components:
    RestClientFactory - Authenticated session and client construction
    create_client_factory - Factory from merged Options
    GlossaryClient - Glossary put / delete / delete-all
    Glossary / GlossaryEntry / GlossaryTerm - Transfer objects

Python 3.13+.
"""

from .dto import Glossary, GlossaryEntry, GlossaryTerm
from .factory import RestClientFactory, create_client_factory
from .glossary import GlossaryClient

__all__ = [
    "Glossary",
    "GlossaryClient",
    "GlossaryEntry",
    "GlossaryTerm",
    "RestClientFactory",
    "create_client_factory",
]
