"""
Structured logging utility for the fetch client.

Log lines carry ``key=value`` fields in front of the message so they can be
grepped or shipped to a log processor without a custom formatter. Failure
reports are only emitted when debug mode was active for the call.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Optional


class ClientLogger:
    """Structured logger for client components."""
    
    def __init__(self, component: str):
        """
        Initialize logger for a specific component.
        
        Args:
            component: Name of the component (e.g., "client", "transport")
        """
        self.component = component
        self.logger = logging.getLogger(f"fdy_fetch_client.{component}")
    
    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]
        
        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")
        
        return f"[{' '.join(fields)}] {message}"
    
    def debug(self, message: str, request_id: Optional[str] = None, **kwargs):
        self.logger.debug(self._format_message(message, request_id=request_id, **kwargs))
    
    def info(self, message: str, request_id: Optional[str] = None, **kwargs):
        self.logger.info(self._format_message(message, request_id=request_id, **kwargs))
    
    def error(self, message: str, request_id: Optional[str] = None,
              error: Optional[BaseException] = None, **kwargs):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)
        
        self.logger.error(self._format_message(message, request_id=request_id, **kwargs))
    
    def report_failure(self, error: BaseException, method: str, url: str,
                       request_id: Optional[str] = None):
        """
        Emit the debug diagnostic for a failed call.
        
        Reports URL, method, status, raw response text and message. Transport
        faults have no status or response text; those fields are left out.
        """
        response = getattr(error, "response", None)
        status = response.get("status") if isinstance(response, dict) else None
        response_text = getattr(error, "response_text", None)
        
        self.error(
            "Request failed",
            request_id=request_id,
            url=url,
            method=method,
            status=status,
            response_text=response_text,
            error=error,
        )
    
    @contextmanager
    def track_request(self, method: str, url: str, debug: bool = False,
                      request_id: Optional[str] = None):
        """
        Context manager to track request timing and log key events.
        
        Args:
            method: HTTP method
            url: Resolved request URL
            debug: Whether failures are reported for this call
            request_id: Optional request ID (generated if not provided)
            
        Yields:
            Dict with request metadata; callers may set ``status_code``
        """
        if request_id is None:
            request_id = str(uuid.uuid4())[:8]
        
        start_time = time.time()
        
        self.debug("Starting request", request_id=request_id, method=method, url=url)
        
        metadata: Dict[str, Any] = {
            'request_id': request_id,
            'method': method,
            'url': url,
            'start_time': start_time,
            'status_code': None,
        }
        
        try:
            yield metadata
            
            duration = time.time() - start_time
            self.info(
                "Completed request",
                request_id=request_id,
                method=method,
                url=url,
                status=metadata['status_code'],
                duration_ms=int(duration * 1000)
            )
            
        except Exception as e:
            if debug:
                self.report_failure(e, method, url, request_id=request_id)
            raise
