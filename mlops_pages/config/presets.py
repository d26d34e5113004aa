"""Built-in configuration literals for the MLOps Training site.

Three snapshots of the site configuration ship with the package. They differ
only in navigation content: the ``kubernetes`` snapshot adds a Kubernetes
section to Module 1, the ``compact`` snapshot starts the large groups
collapsed, and each points at its own repository. None of them supersedes
another.

Examples
--------
>>> from mlops_pages.config import load_config
>>> site = load_config()
>>> [item.text for item in site.nav]
['Home', 'Study Guide', 'Module 1', 'Module 3']
>>> load_config("kubernetes").edit_link.pattern
'https://github.com/mlops-training/mlops-training/edit/main/docs/:path'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import types
import typing as typ

from mlops_pages._constants import DEFAULT_VARIANT

from .loader import build_site_config

if typ.TYPE_CHECKING:
    from .models import MarkdownHook, SiteConfig


@dc.dataclass(frozen=True, slots=True)
class _Variant:
    """Knobs that distinguish one configuration snapshot from another."""

    repo: str
    include_kubernetes: bool = False
    collapse_modules: bool = False


VARIANTS: cabc.Mapping[str, _Variant] = types.MappingProxyType(
    {
        "default": _Variant(repo="yourusername/mlops-training"),
        "kubernetes": _Variant(
            repo="mlops-training/mlops-training", include_kubernetes=True
        ),
        "compact": _Variant(repo="example-org/mlops-training", collapse_modules=True),
    }
)


def load_config(
    variant: str = DEFAULT_VARIANT, *, markdown_hook: MarkdownHook | None = None
) -> SiteConfig:
    """Build the baked-in site configuration for ``variant``.

    Parameters
    ----------
    variant : str, optional
        Name of the configuration snapshot; one of :data:`VARIANTS`.
    markdown_hook : MarkdownHook, optional
        Customization hook applied to the markdown processor.

    Returns
    -------
    SiteConfig
        A freshly constructed configuration. Repeated calls return equal
        object graphs.

    Raises
    ------
    KeyError
        If ``variant`` is not a known snapshot name.
    """
    try:
        settings = VARIANTS[variant]
    except KeyError as exc:
        available = ", ".join(VARIANTS)
        msg = f"Unknown variant '{variant}'. Known variants: {available}"
        raise KeyError(msg) from exc
    return build_site_config(_site_literal(settings), markdown_hook=markdown_hook)


def _site_literal(variant: _Variant) -> dict[str, typ.Any]:
    repo_url = f"https://github.com/{variant.repo}"
    return {
        "title": "MLOps Training",
        "description": (
            "Hands-on training for MLOps infrastructure, deployment, and CI/CD"
        ),
        "cleanUrls": True,
        "ignoreDeadLinks": True,
        "themeConfig": {
            "nav": [
                {"text": "Home", "link": "/"},
                {"text": "Study Guide", "link": "/README"},
                {"text": "Module 1", "link": "/module-01/README"},
                {"text": "Module 3", "link": "/module-03/README"},
            ],
            "sidebar": {
                "/": [
                    {
                        "text": "Getting Started",
                        "items": [{"text": "Study Guide", "link": "/README"}],
                    },
                    _module_one(variant),
                    _module_three(variant),
                ]
            },
            "socialLinks": [{"icon": "github", "link": repo_url}],
            "footer": {
                "message": "Released under the MIT License.",
                "copyright": "Copyright © 2026-present",
            },
            "editLink": {
                "pattern": f"{repo_url}/edit/main/docs/:path",
                "text": "Edit this page on GitHub",
            },
            "lastUpdated": {
                "text": "Last updated",
                "formatOptions": {"dateStyle": "full", "timeStyle": "medium"},
            },
            "search": {"provider": "local"},
        },
        "markdown": {"lineNumbers": True},
        "vite": {"build": {"chunkSizeWarningLimit": 1000}},
    }


def _links(prefix: str, entries: list[tuple[str, str]]) -> list[dict[str, str]]:
    return [{"text": text, "link": f"{prefix}/{slug}"} for text, slug in entries]


def _module_one(variant: _Variant) -> dict[str, typ.Any]:
    collapsed = variant.collapse_modules
    git = "/module-01/git"
    aws = "/module-01/aws"
    items: list[dict[str, typ.Any]] = [
        {"text": "Module Overview", "link": "/module-01/README"},
        {
            "text": "Git for Teams",
            "collapsed": collapsed,
            "items": [
                *_links(
                    git,
                    [
                        ("Overview", "README"),
                        ("Git Basics", "git-basics"),
                        ("Understanding Git Areas", "git-areas"),
                        ("Repository Governance", "repository-governance"),
                    ],
                ),
                {
                    "text": "Branching Strategies",
                    "collapsed": True,
                    "items": _links(
                        git,
                        [
                            ("Strategy Overview", "branching-strategies"),
                            ("Trunk-Based Development", "trunk-based"),
                            ("Git Flow", "git-flow"),
                            ("GitHub Flow", "github-flow"),
                        ],
                    ),
                },
                *_links(
                    git,
                    [
                        ("Remote Operations", "remote-operations"),
                        ("Pull Requests & Code Review", "pull-requests"),
                        ("Merge Conflicts", "merge-conflicts"),
                        ("Team Conventions", "team-conventions"),
                        ("Workflow Examples", "workflow-examples"),
                    ],
                ),
            ],
        },
        {
            "text": "AWS Cloud Services",
            "collapsed": True,
            "items": [
                *_links(
                    aws,
                    [
                        ("AWS Overview", "README"),
                        ("Cloud Concepts (Domain 1)", "cloud-concepts"),
                        ("Security & Compliance (Domain 2)", "security-compliance"),
                        ("Deployment Methods", "deployment-methods"),
                        ("Compute Services", "compute-services"),
                        ("Storage Services", "storage-services"),
                        ("Database Services", "database-services"),
                        ("Networking Services", "networking-services"),
                        ("Analytics Services", "analytics-services"),
                        ("AI/ML Services", "ai-ml-services"),
                        ("Billing & Pricing (Domain 4)", "billing-pricing"),
                    ],
                ),
                {
                    "text": "LocalStack Labs",
                    "collapsed": True,
                    "items": _links(
                        f"{aws}/localstack",
                        [
                            ("Quick Start", "quick-start"),
                            ("Full Guide", "guide"),
                            ("Compute Practice", "compute"),
                            ("Storage & Database Practice", "storage-database"),
                            (
                                "Networking & Analytics Practice",
                                "networking-analytics-security",
                            ),
                        ],
                    ),
                },
            ],
        },
        {
            "text": "Terraform",
            "collapsed": True,
            "items": _links(
                "/module-01/terraform",
                [
                    ("Terraform Basics", "basics"),
                    ("Terraform Examples", "examples"),
                    ("Terraform Exercises", "exercises"),
                ],
            ),
        },
    ]
    if variant.include_kubernetes:
        items.append(
            {
                "text": "Kubernetes",
                "collapsed": True,
                "items": _links(
                    "/module-01/kubernetes",
                    [
                        ("Kubernetes Overview", "README"),
                        ("Core Concepts", "core-concepts"),
                        ("Workloads & Deployments", "workloads"),
                        ("Services & Networking", "networking"),
                        ("Helm Charts", "helm"),
                    ],
                ),
            }
        )
    return {
        "text": "Module 1: Infrastructure & Prerequisites",
        "collapsed": collapsed,
        "items": items,
    }


def _module_three(variant: _Variant) -> dict[str, typ.Any]:
    collapsed = variant.collapse_modules
    monitoring = "/module-03/monitoring"
    grafana_stack = [
        ("Grafana", "grafana"),
        ("Grafana Mimir (Metrics)", "mimir"),
        ("Grafana Loki (Logs)", "loki"),
        ("Grafana Tempo (Traces)", "tempo"),
        ("Grafana Pyroscope (Profiles)", "pyroscope"),
    ]
    return {
        "text": "Module 3: Deployment and Operation",
        "collapsed": collapsed,
        "items": [
            {"text": "Module Overview", "link": "/module-03/README"},
            {
                "text": "Testing",
                "collapsed": True,
                "items": [
                    {"text": "Overview", "link": "/module-03/testing/unit/README"}
                ],
            },
            {
                "text": "CI/CD",
                "collapsed": True,
                "items": [
                    {
                        "text": "Overview",
                        "link": "/module-03/cicd/github-actions/README",
                    }
                ],
            },
            {
                "text": "Monitoring & Observability",
                "collapsed": collapsed,
                "items": [
                    {
                        "text": "Quick Start with intro-to-mltp",
                        "link": f"{monitoring}/README",
                    },
                    *(
                        {
                            "text": text,
                            "collapsed": False,
                            "items": [
                                {
                                    "text": "Overview & Architecture",
                                    "link": f"{monitoring}/{slug}",
                                }
                            ],
                        }
                        for text, slug in grafana_stack
                    ),
                    {"text": "Quickstart Guide", "link": f"{monitoring}/quickstart"},
                ],
            },
        ],
    }


__all__ = ["VARIANTS", "load_config"]
