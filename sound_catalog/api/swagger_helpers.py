"""Helpers to reduce repetitive Flasgger/Swagger doc declarations.

Every failing endpoint of the API answers with the same ``{"error": "..."}``
body. Rather than repeating that schema in each docstring, views are marked
with `with_error_response` and `apply_swagger_extras(app)` merges the shared
response definitions into their YAML before Flasgger builds the spec.
"""
from typing import Callable
import textwrap
import yaml


ERROR_SCHEMA_YAML = """
type: object
properties:
  error:
    type: string
required:
  - error
"""


def with_error_response(status: int, description: str):
    """Decorator to document an error response using the shared error schema.

    May be stacked; each use adds one status code. The decorator only sets
    an attribute on the function object, `apply_swagger_extras` does the rest.
    """

    def _decorator(func: Callable) -> Callable:
        responses = list(getattr(func, "__swagger_error_responses__", []))
        responses.append((int(status), description))
        setattr(func, "__swagger_error_responses__", responses)
        return func

    return _decorator


def _get_attr_from_wrapped(obj, name):
    """Try to find attribute `name` on obj or on its __wrapped__ chain."""
    cur = obj
    for _ in range(10):
        if cur is None:
            return None
        if hasattr(cur, name):
            return getattr(cur, name)
        cur = getattr(cur, "__wrapped__", None)
    return None


def apply_swagger_extras(app):
    """Inject the shared error responses into marked view docstrings.

    Must run after all blueprints are registered and before Flasgger is
    initialized. The mutation is idempotent thanks to a marker comment.
    """

    marker = "# __error_responses_injected__"

    for endpoint, view in list(app.view_functions.items()):
        if endpoint.startswith("static"):
            continue

        error_responses = _get_attr_from_wrapped(view, "__swagger_error_responses__")
        if not error_responses:
            continue

        doc = view.__doc__ or ""
        if marker in doc:
            continue

        pre = doc
        existing_yaml = {}
        if "---" in doc:
            sep = doc.find("---")
            pre = doc[:sep]
            yaml_part = textwrap.dedent(doc[sep + 4:])
            try:
                existing_yaml = yaml.safe_load(yaml_part) or {}
            except yaml.YAMLError as e:
                app.logger.warning("swagger_helpers: could not parse YAML of %s: %s", endpoint, e)
                continue

        final = dict(existing_yaml) if isinstance(existing_yaml, dict) else {}
        responses = dict(final.get("responses") or {})
        for status, description in error_responses:
            responses.setdefault(status, {"description": description, "schema": yaml.safe_load(ERROR_SCHEMA_YAML)})
        final["responses"] = dict(sorted(responses.items(), key=lambda item: str(item[0])))

        dumped = yaml.safe_dump(final, sort_keys=False)
        view.__doc__ = pre.rstrip() + "\n\n---\n" + marker + "\n" + dumped
