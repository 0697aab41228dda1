from typing import Any, Dict, List, Optional

from app.models.base import CamelModel


class ReportRequest(CamelModel):
    """
    Snapshots of the tables shown on the dashboard, as the client holds them.
    Rows are free-form dictionaries; the renderer prints their values.
    """
    production_data: Optional[List[Dict[str, Any]]] = None
    logistics_data: Optional[List[Dict[str, Any]]] = None
    tracking_data: Optional[List[Dict[str, Any]]] = None
