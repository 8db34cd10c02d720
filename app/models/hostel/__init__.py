from app.models.hostel.hostel import Hostel

__all__ = ["Hostel"]
