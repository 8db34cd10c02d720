import pytest

from app.schemas.hostel import HostelCreate
from app.services.common.errors import AuthorizationError, ConflictError, NotFoundError
from app.services.hostel import HostelService


@pytest.fixture
def service(db):
    return HostelService(db)


def test_only_super_admin_creates_and_deletes(service, admin, hostel):
    with pytest.raises(AuthorizationError):
        service.create_hostel(admin, HostelCreate(name="Annex"))
    with pytest.raises(AuthorizationError):
        service.delete_hostel(admin, hostel.id)

    assert service.get_hostel(admin, hostel.id).id == hostel.id


def test_delete_hostel(service, super_admin, hostel, make_hostel, make_student):
    make_student(hostel)
    annex = make_hostel(name="Annex")

    with pytest.raises(ConflictError, match="Hostel still has students"):
        service.delete_hostel(super_admin, hostel.id)

    service.delete_hostel(super_admin, annex.id)

    with pytest.raises(NotFoundError):
        service.get_hostel(super_admin, annex.id)
    assert service.get_hostel(super_admin, hostel.id).id == hostel.id
