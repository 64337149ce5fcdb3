"""
conftest.py — Shared fixtures for the apidiscovery test suite.
"""

import asyncio

import pytest

from apidiscovery.lib.auth.base import BaseAuth
from apidiscovery.lib.enums.http import HttpMethod

BASE_URL = "https://discovery.example.com/discovery/v1/"


class RecordingAuth(BaseAuth):
    """Returns a canned payload and records every (url, method) it receives."""

    def __init__(self, payload=None):
        self.payload = payload if payload is not None else {}
        self.calls = []

    async def request(self, url, method=HttpMethod.GET):
        self.calls.append((url, str(method)))
        # yield to the loop so concurrent calls interleave
        await asyncio.sleep(0)
        return self.payload


class FailingAuth(BaseAuth):
    """Always raises the exception it was built with."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    async def request(self, url, method=HttpMethod.GET):
        self.calls += 1
        raise self.error


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def recording_auth():
    return RecordingAuth()


@pytest.fixture
def sample_rest_description():
    """A small but complete discovery document."""
    return {
        "kind": "discovery#restDescription",
        "discoveryVersion": "v1",
        "id": "storage:v1",
        "name": "storage",
        "version": "v1",
        "title": "Cloud Storage JSON API",
        "rootUrl": "https://storage.googleapis.com/",
        "servicePath": "storage/v1/",
        "batchPath": "batch/storage/v1",
        "version_module": True,
        "auth": {
            "oauth2": {
                "scopes": {
                    "https://www.googleapis.com/auth/devstorage.read_only": {
                        "description": "View your data in Google Cloud Storage"
                    }
                }
            }
        },
        "parameters": {
            "alt": {
                "type": "string",
                "default": "json",
                "enum": ["json"],
                "enumDescriptions": ["Responses with Content-Type of application/json"],
                "location": "query",
            }
        },
        "schemas": {
            "Bucket": {
                "id": "Bucket",
                "type": "object",
                "properties": {
                    "name": {"type": "string", "annotations": {"required": ["storage.buckets.insert"]}},
                    "owner": {"$ref": "Owner"},
                    "labels": {"type": "object", "additionalProperties": {"type": "string"}},
                },
            },
            "Buckets": {
                "id": "Buckets",
                "type": "object",
                "properties": {"items": {"type": "array", "items": {"$ref": "Bucket"}}},
            },
            "Owner": {
                "id": "Owner",
                "type": "object",
                "properties": {"entity": {"type": "string"}, "manager": {"$ref": "Owner"}},
            },
        },
        "resources": {
            "buckets": {
                "methods": {
                    "list": {
                        "id": "storage.buckets.list",
                        "path": "b",
                        "httpMethod": "GET",
                        "parameters": {
                            "project": {"type": "string", "required": True, "location": "query"},
                            "maxResults": {
                                "type": "integer",
                                "format": "uint32",
                                "minimum": "0",
                                "default": "1000",
                                "location": "query",
                            },
                        },
                        "parameterOrder": ["project"],
                        "response": {"$ref": "Buckets"},
                        "scopes": ["https://www.googleapis.com/auth/devstorage.read_only"],
                    },
                    "insert": {
                        "id": "storage.buckets.insert",
                        "path": "b",
                        "httpMethod": "POST",
                        "request": {"$ref": "Bucket", "parameterName": "resource"},
                        "response": {"$ref": "Bucket"},
                    },
                },
                "resources": {
                    "acl": {
                        "methods": {
                            "get": {
                                "id": "storage.buckets.acl.get",
                                "path": "b/{bucket}/acl/{entity}",
                                "flatPath": "b/{bucket}/acl/{entity}",
                                "httpMethod": "GET",
                                "response": {"$ref": "BucketAccessControl"},
                            }
                        }
                    }
                },
            },
            "objects": {
                "methods": {
                    "insert": {
                        "id": "storage.objects.insert",
                        "path": "b/{bucket}/o",
                        "httpMethod": "POST",
                        "supportsMediaUpload": True,
                        "mediaUpload": {
                            "accept": ["*/*"],
                            "protocols": {
                                "simple": {"multipart": True, "path": "/upload/storage/v1/b/{bucket}/o"},
                                "resumable": {"multipart": True, "path": "/resumable/upload/storage/v1/b/{bucket}/o"},
                            },
                        },
                    }
                }
            },
        },
        "methods": {
            "getServiceAccount": {"id": "storage.getServiceAccount", "httpMethod": "GET"}
        },
    }


@pytest.fixture
def sample_directory_listing():
    return {
        "kind": "discovery#directoryList",
        "discoveryVersion": "v1",
        "items": [
            {
                "kind": "discovery#directoryItem",
                "id": "drive:v3",
                "name": "drive",
                "version": "v3",
                "title": "Google Drive API",
                "discoveryRestUrl": "https://www.googleapis.com/discovery/v1/apis/drive/v3/rest",
                "icons": {"x16": "https://www.gstatic.com/images/branding/product/1x/googleg_16dp.png"},
                "preferred": True,
            },
            {
                "kind": "discovery#directoryItem",
                "id": "drive:v2",
                "name": "drive",
                "version": "v2",
                "labels": ["deprecated"],
                "preferred": False,
            },
        ],
    }
