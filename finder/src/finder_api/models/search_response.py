# coding: utf-8

"""
    Access Package Resource Finder API (v1)
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List

from pydantic import BaseModel, Field, StrictStr

from finder_api.models.match_record import MatchRecord
from finder_api.models.partial_failure import PartialFailure


class SearchResponse(BaseModel):
    """
    Matches found for a search, echoing the criterion.
    """  # noqa: E501

    results: List[MatchRecord] = Field(default_factory=list)
    search_type: StrictStr = Field(alias="searchType")
    search_value: StrictStr = Field(alias="searchValue")
    partial_failures: List[PartialFailure] = Field(
        default_factory=list,
        description="Access packages whose details could not be fetched.",
        alias="partialFailures",
    )
    __properties: ClassVar[list[str]] = ["results", "searchType", "searchValue", "partialFailures"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_dict(self) -> Dict[str, Any]:
        """Return the dictionary representation of the model using alias."""
        return self.model_dump(by_alias=True)
