import os
import ssl
from typing import Any, Optional

from .._config import HostConfig

CA_FILE_ENV_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
CA_DIR_ENV_VAR = "SSL_CERT_DIR"


def expand_path(path: Optional[str]) -> Optional[str]:
    if not path:
        return None
    return os.path.expanduser(os.path.expandvars(path))


def ca_file(config: HostConfig) -> Optional[str]:
    """The CA bundle pinned for this host, if any.

    ``HostConfig.ca_bundle`` wins, then ``SSL_CERT_FILE`` and ``REQUESTS_CA_BUNDLE``.
    """
    if config.ca_bundle:
        return expand_path(config.ca_bundle)
    for name in CA_FILE_ENV_VARS:
        path = expand_path(os.environ.get(name))
        if path:
            return path
    return None


def create_ssl_context(config: HostConfig) -> ssl.SSLContext:
    """TLS context for the client of a ``Host``.

    A pinned CA bundle is always honored. Without one, system certificates are
    used through truststore when it is installed, and certifi's bundle otherwise.
    """
    cafile = ca_file(config)
    if cafile is None:
        try:
            import truststore

            return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        except ImportError:
            import certifi

            cafile = certifi.where()

    return ssl.create_default_context(
        cafile=cafile,
        capath=expand_path(os.environ.get(CA_DIR_ENV_VAR)),
    )


def get_httpx_client_kwargs(config: HostConfig) -> dict[str, Any]:
    """Keyword arguments for the ``httpx.AsyncClient`` a ``Host`` builds."""
    return {
        "verify": create_ssl_context(config),
        "timeout": config.timeout,
        "headers": config.default_headers,
    }
