"""
Base model for document-backed entities

Stored documents use camelCase field names (createdAt, userId, ...).
Models declare snake_case attributes and (de)serialize through camelCase
aliases, so both spellings are accepted on input and camelCase is emitted.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Pydantic model whose wire format mirrors the Firestore document"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_dict(self) -> dict:
        """Serialize with camelCase keys"""
        return self.model_dump(by_alias=True)

    def to_document(self, partial: bool = False) -> dict:
        """
        Fields ready to write to the store

        partial=True keeps only the fields the client sent (PATCH bodies);
        otherwise defaults are included and empty optionals dropped.
        """
        if partial:
            return self.model_dump(by_alias=True, exclude_unset=True)
        return self.model_dump(by_alias=True, exclude_none=True)
