"""Client-side TLS configuration for talking to a remote daemon."""

import ssl

from dockercli.errors import TLSConfigError
from dockercli.logging import get_logger
from dockercli.models import GlobalOptions

logger = get_logger(__name__)


def build_tls_config(options: GlobalOptions) -> ssl.SSLContext | None:
    """Return an SSL context when ``--tls`` or ``--tlsverify`` is set, else ``None``.

    With ``--tlsverify`` only the configured CA is trusted; plain ``--tls``
    encrypts without checking the daemon's certificate. A client certificate
    is presented whenever both the certificate and key files exist.
    """
    if not options.use_tls:
        return None

    if options.tlsverify:
        if not options.tlscacert.is_file():
            msg = f"Couldn't read ca cert {options.tlscacert}"
            raise TLSConfigError(msg)
        try:
            context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH, cafile=str(options.tlscacert))
        except (OSError, ssl.SSLError) as exc:
            msg = f"Couldn't read ca cert {options.tlscacert}: {exc}"
            raise TLSConfigError(msg) from exc
    else:
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

    if options.tlscert.is_file() and options.tlskey.is_file():
        try:
            context.load_cert_chain(certfile=str(options.tlscert), keyfile=str(options.tlskey))
        except (OSError, ssl.SSLError) as exc:
            msg = f"Couldn't load X509 key pair: {exc}. Key encrypted?"
            raise TLSConfigError(msg) from exc

    logger.debug(
        'tls_config_built',
        verify=options.tlsverify,
        client_cert=options.tlscert.is_file(),
    )
    return context


__all__ = ['build_tls_config']
