"""Pure helpers that turn an endpoint, path template and parameters into a URL."""
from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import quote

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_UNRESERVED = "-_.!~*'()"


def encode_uri_component(value: object) -> str:
  """Percent-encode ``value`` the way JavaScript's encodeURIComponent does."""
  return quote(str(value), safe=_UNRESERVED)


def interpolate_params(path: str, params: Optional[Mapping[str, object]]) -> str:
  """Replace ``{name}`` placeholders with encoded values from ``params``.

  Placeholders without a matching parameter are left in place.
  """
  if not params:
    return path

  result = path
  for name, value in params.items():
    result = result.replace('{' + name + '}', encode_uri_component(value))
  return result


def build_query_string(params: Optional[Mapping[str, object]], is_query_start: bool) -> str:
  """Encode ``params`` as a query string.

  ``is_query_start`` means the path already carries a literal ``?``, so the
  generated pairs are joined on with ``&`` instead of opening a new query.
  """
  if not params:
    return ''

  pairs = [
    f'{encode_uri_component(name)}={encode_uri_component(value)}'
    for name, value in params.items()
  ]
  separator = '&' if is_query_start else '?'
  return separator + '&'.join(pairs)


def build_url(
  endpoint: str,
  path: str,
  query_params: Optional[Mapping[str, object]] = None,
  path_params: Optional[Mapping[str, object]] = None,
) -> str:
  """Combine endpoint, path template and parameters into the final URL."""
  processed_endpoint = endpoint[:-1] if endpoint.endswith('/') else endpoint
  path_with_params = interpolate_params(path, path_params)
  is_constant_query_present = '?' in path_with_params
  query_string = build_query_string(query_params, is_constant_query_present)

  return processed_endpoint + path_with_params + query_string
