"""
Shared type aliases for the domain model.
"""

from typing import NewType

EntityId = NewType("EntityId", int)

Name = str
ErrorMessage = str
