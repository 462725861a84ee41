"""Ship log records to a remote logging endpoint.

Each record is posted as JSON::

    {"stack": "backend", "level": "info", "package": "db", "message": "..."}

Callers pick the package with ``extra={"package": "db"}``; records without a
known package are sent as ``default_package``. Posting happens on a
``QueueListener`` thread so request handlers never wait on the network.
"""

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import Dict, Optional

import httpx


ALLOWED_STACKS = frozenset({"backend", "frontend"})
ALLOWED_PACKAGES = frozenset({
    "cache", "controller", "cron_job", "db", "domain", "handler", "repository", "route",
})


def remote_level_name(levelno: int) -> str:
    """Map a logging level number to the endpoint's level vocabulary."""
    if levelno >= logging.CRITICAL:
        return "fatal"
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warn"
    if levelno >= logging.INFO:
        return "info"
    return "debug"


class RemoteLogHandler(logging.Handler):
    """Logging handler that POSTs each record to an HTTP endpoint."""
    
    def __init__(
        self,
        endpoint: str,
        auth_token: Optional[str] = None,
        stack: str = "backend",
        default_package: str = "handler",
        client: Optional[httpx.Client] = None,
        timeout: float = 5.0,
        level: int = logging.NOTSET,
    ):
        """Initialize remote log handler.
        
        Args:
            endpoint: URL that receives log records
            auth_token: Optional bearer token sent with every record
            stack: Stack name sent with every record ("backend" or "frontend")
            default_package: Package used when a record does not name a known one
            client: Optional httpx client (one is created and owned if not given)
            timeout: Request timeout in seconds for the owned client
            level: Minimum level to ship
        """
        super().__init__(level)
        if stack not in ALLOWED_STACKS:
            raise ValueError(f"Invalid stack '{stack}', expected one of {sorted(ALLOWED_STACKS)}")
        if default_package not in ALLOWED_PACKAGES:
            raise ValueError(f"Invalid package '{default_package}'")
        
        self.endpoint = endpoint
        self.stack = stack
        self.default_package = default_package
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._headers: Dict[str, str] = {}
        if auth_token:
            self._headers["Authorization"] = f"Bearer {auth_token}"
    
    def build_payload(self, record: logging.LogRecord) -> Dict[str, str]:
        package = getattr(record, "package", None)
        if package not in ALLOWED_PACKAGES:
            package = self.default_package
        
        return {
            "stack": self.stack,
            "level": remote_level_name(record.levelno),
            "package": package,
            "message": self.format(record),
        }
    
    def emit(self, record: logging.LogRecord) -> None:
        try:
            response = self._client.post(
                self.endpoint,
                json=self.build_payload(record),
                headers=self._headers,
            )
            response.raise_for_status()
        except Exception:
            self.handleError(record)
    
    def close(self) -> None:
        if self._owns_client:
            self._client.close()
        super().close()


def start_remote_logging(
    logger: logging.Logger,
    endpoint: str,
    auth_token: Optional[str] = None,
    stack: str = "backend",
    level: int = logging.INFO,
    client: Optional[httpx.Client] = None,
) -> QueueListener:
    """Attach a queued remote handler to logger and start shipping.
    
    Args:
        logger: Logger whose records should be shipped
        endpoint: URL that receives log records
        auth_token: Optional bearer token
        stack: Stack name sent with every record
        level: Minimum level to ship
        
    Returns:
        The running listener; pass it to stop_remote_logging on shutdown
    """
    handler = RemoteLogHandler(endpoint, auth_token=auth_token, stack=stack, client=client)
    log_queue: queue.Queue = queue.Queue(-1)
    
    queue_handler = QueueHandler(log_queue)
    queue_handler.setLevel(level)
    logger.addHandler(queue_handler)
    
    listener = QueueListener(log_queue, handler, respect_handler_level=True)
    listener.start()
    logger.info(f"Shipping logs to {endpoint}")
    return listener


def stop_remote_logging(listener: QueueListener, logger: Optional[logging.Logger] = None) -> None:
    """Flush pending records and close the remote handlers.
    
    If logger is given, the queue handler feeding this listener is detached from it.
    """
    if logger is not None:
        for handler in list(logger.handlers):
            if isinstance(handler, QueueHandler) and handler.queue is listener.queue:
                logger.removeHandler(handler)
    listener.stop()
    for handler in listener.handlers:
        handler.close()
