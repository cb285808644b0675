"""Sample Azure DevOps wiki REST payloads.

Page listings come back in one of three shapes:
- {"value": [...]}: a flat list of root pages
- a single object with a nested "subPages" tree
- a single object without children
"""

# Flat listing, deliberately out of order
FLAT_LISTING = {
    "value": [
        {"id": 2, "path": "/B", "order": 1},
        {"id": 1, "path": "/A", "order": 0},
    ]
}

# Single root with a nested subtree (recursionLevel=Full)
NESTED_LISTING = {
    "id": 1,
    "path": "/",
    "order": 0,
    "gitItemPath": "/.order",
    "subPages": [
        {
            "id": 3,
            "path": "/Guides",
            "order": 2,
            "gitItemPath": "/Guides.md",
            "subPages": [
                {"id": 5, "path": "/Guides/Setup", "order": 1, "gitItemPath": "/Guides/Setup.md"},
                {"id": 4, "path": "/Guides/Intro", "order": 0, "gitItemPath": "/Guides/Intro.md"},
            ],
        },
        {"id": 2, "path": "/Home", "order": 1, "gitItemPath": "/Home.md"},
    ],
}

# Single root without children
SINGLE_ROOT = {"id": 7, "path": "/Home", "order": 0}

# Siblings with equal order keep their source position
TIED_ORDER_LISTING = {
    "value": [
        {"id": "x", "path": "/X", "order": 1},
        {"id": "y", "path": "/Y", "order": 1},
        {"id": "z", "path": "/Z", "order": 0},
    ]
}

PAGE_READ = {
    "id": 42,
    "path": "/Home/Overview",
    "order": 3,
    "gitItemPath": "/Home/Overview.md",
    "isParentPage": False,
    "content": "# Overview\n\nWelcome.",
}

PAGE_WRITE_WRAPPED = {
    "page": {
        "id": 12,
        "path": "/Docs/Release",
        "order": 1,
        "gitItemPath": "/Docs/Release.md",
        "eTag": ["\"c0ffee\""],
    }
}

SEARCH_RESPONSE = {
    "count": 2,
    "results": [
        {
            "fileName": "Deployment.md",
            "path": "/Ops/Deployment.md",
            "project": {"name": "MyProject"},
            "wiki": {"id": "w-1", "name": "MyProject.wiki", "url": "https://dev.azure.com/org/MyProject/_wiki/wikis/MyProject.wiki"},
            "hits": [
                {"fieldReferenceName": "content", "highlights": ["the <highlighthit>deployment</highlighthit> job"]},
                {"fieldReferenceName": "content", "highlights": ["rollback a <highlighthit>deployment</highlighthit>"]},
            ],
        },
        {
            "fileName": "Notes.md",
            "path": "",
            "project": {"name": "MyProject"},
            "wiki": {"id": "w-2"},
            "hits": [],
        },
    ],
}

WIKI_LISTING = {
    "count": 1,
    "value": [
        {
            "id": "6a1b2c3d",
            "name": "MyProject.wiki",
            "type": "projectWiki",
            "url": "https://dev.azure.com/org/proj/_apis/wiki/wikis/6a1b2c3d",
            "repositoryId": "r-99",
            "mappedPath": "/",
        }
    ],
}
