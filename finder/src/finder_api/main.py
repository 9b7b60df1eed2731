# coding: utf-8

"""
    Access Package Resource Finder API

    Finds the Entra ID access packages that grant roles on an application, group or SharePoint site.

    The version of the OpenAPI document: 1.0.0
"""


from fastapi import FastAPI

from finder_api.apis.health_api import router as HealthApiRouter
from finder_api.apis.resolve_api import router as ResolveApiRouter
from finder_api.apis.search_api import router as SearchApiRouter

app = FastAPI(
    title="Access Package Resource Finder API",
    description="Finds the Entra ID access packages that grant roles on an application, group or SharePoint site.",
    version="1.0.0",
)

app.include_router(HealthApiRouter)
app.include_router(ResolveApiRouter)
app.include_router(SearchApiRouter)
