from etagcache._async._endpoints import (
    AsyncEndpointBase as AsyncEndpointBase,
    AsyncPeopleEndpoint as AsyncPeopleEndpoint,
)
from etagcache._async._fetcher import AsyncValidatingFetcher as AsyncValidatingFetcher
from etagcache._async._store import AsyncCacheStore as AsyncCacheStore
from etagcache._async._transports import (
    AsyncBaseTransport as AsyncBaseTransport,
    AsyncHTTPTransport as AsyncHTTPTransport,
)
from etagcache._config import Config as Config, get_default_config as get_default_config
from etagcache._decoders import BaseDecoder as BaseDecoder, PydanticDecoder as PydanticDecoder
from etagcache._exceptions import (
    CacheConsistencyError as CacheConsistencyError,
    DecodeError as DecodeError,
    EtagCacheError as EtagCacheError,
    TransportError as TransportError,
)
from etagcache._models import CachedValue as CachedValue, CacheEntry as CacheEntry
from etagcache._resources import (
    Bucket as Bucket,
    Person as Person,
    PersonTodoList as PersonTodoList,
    Todo as Todo,
)
from etagcache._shapes import Shape as Shape, ShapeInfo as ShapeInfo, detect_shape as detect_shape
from etagcache._sync._endpoints import EndpointBase as EndpointBase, PeopleEndpoint as PeopleEndpoint
from etagcache._sync._fetcher import ValidatingFetcher as ValidatingFetcher
from etagcache._sync._store import CacheStore as CacheStore
from etagcache._sync._transports import BaseTransport as BaseTransport, HTTPTransport as HTTPTransport

__all__ = (
    ## Stores
    "AsyncCacheStore",
    "CacheStore",
    ## Fetchers
    "AsyncValidatingFetcher",
    "ValidatingFetcher",
    ## Transports
    "AsyncBaseTransport",
    "AsyncHTTPTransport",
    "BaseTransport",
    "HTTPTransport",
    ## Models
    "CacheEntry",
    "CachedValue",
    "Shape",
    "ShapeInfo",
    "detect_shape",
    ## Decoders
    "BaseDecoder",
    "PydanticDecoder",
    ## Exceptions
    "EtagCacheError",
    "TransportError",
    "CacheConsistencyError",
    "DecodeError",
    ## Configuration
    "Config",
    "get_default_config",
    ## Endpoints
    "AsyncEndpointBase",
    "AsyncPeopleEndpoint",
    "EndpointBase",
    "PeopleEndpoint",
    ## Resources
    "Bucket",
    "Person",
    "PersonTodoList",
    "Todo",
)
