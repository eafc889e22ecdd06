from typing import Any, Dict, List, Optional
from datetime import datetime


def format_datetime(dt: Optional[datetime]) -> Optional[str]:
    """Formatear datetime para respuestas JSON"""
    if dt:
        return dt.isoformat()
    return None


class ResponseFormatter:
    """Formateador de respuestas estándar"""

    @staticmethod
    def success(data: Any, meta: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = {"success": True, "data": data}
        if meta is not None:
            response["meta"] = meta
        return response

    @staticmethod
    def error(message: str, errors: Optional[List[str]] = None) -> Dict[str, Any]:
        response = {"success": False, "message": message}
        if errors:
            response["errors"] = errors
        return response
