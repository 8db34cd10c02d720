from app.schemas.hostel.hostel_base import HostelBase, HostelCreate, HostelUpdate
from app.schemas.hostel.hostel_response import HostelResponse

__all__ = [
    "HostelBase",
    "HostelCreate",
    "HostelUpdate",
    "HostelResponse",
]
