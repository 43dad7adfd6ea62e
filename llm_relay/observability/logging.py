"""
Structured logging for request builders and routing.

Every log line carries ``[provider=... key=value]`` fields so that one
grep finds all activity for a provider, model or request.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional


class ProviderLogger:
    """Structured logger scoped to one provider (or the router)."""
    
    def __init__(self, provider_name: str):
        self.provider = provider_name
        self.logger = logging.getLogger(f"llm_relay.providers.{provider_name}")
    
    def _format_message(self, message: str, fields: Dict[str, Any]) -> str:
        parts = [f"provider={self.provider}"]
        parts.extend(f"{key}={value}" for key, value in fields.items() if value is not None)
        return f"[{' '.join(parts)}] {message}"
    
    def _log(self, level: int, message: str, **fields):
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._format_message(message, fields))
    
    def debug(self, message: str, model: Optional[str] = None, **fields):
        self._log(logging.DEBUG, message, model=model, **fields)
    
    def warning(self, message: str, model: Optional[str] = None, **fields):
        self._log(logging.WARNING, message, model=model, **fields)
    
    def error(self, message: str, model: Optional[str] = None,
              error: Optional[Exception] = None, **fields):
        if error is not None:
            fields['error_type'] = type(error).__name__
            fields['error_msg'] = str(error)
        self._log(logging.ERROR, message, model=model, **fields)
    
    @contextmanager
    def track_request(self, method: str, model: Optional[str],
                      request_id: Optional[str] = None) -> Iterator[str]:
        """
        Log start, duration and failure of one request preparation.
        
        Args:
            method: Operation name (e.g. "prepare")
            model: Model identifier, if known
            request_id: Correlation ID; a short random one is generated if omitted
            
        Yields:
            The request_id used in the log lines
        """
        request_id = request_id or uuid.uuid4().hex[:8]
        started = time.perf_counter()
        self.debug(f"Starting {method}", model=model, request_id=request_id)
        
        try:
            yield request_id
        except Exception as e:
            self.error(
                f"Failed {method}",
                model=model,
                error=e,
                request_id=request_id,
                duration_ms=int((time.perf_counter() - started) * 1000)
            )
            raise
        
        self.debug(
            f"Completed {method}",
            model=model,
            request_id=request_id,
            duration_ms=int((time.perf_counter() - started) * 1000)
        )
