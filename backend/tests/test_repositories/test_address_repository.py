"""
Unit tests for AddressRepository (single default address per user)
"""
from app.repositories.address_repository import AddressRepository


def address(user_id="u1", **fields):
    data = {
        "firstName": "Asha",
        "lastName": "Rao",
        "address": "12 MG Road",
        "city": "Pune",
        "state": "MH",
        "zipCode": "411001",
        "country": "India",
        "phone": "9999999999",
        "isDefault": False,
    }
    data.update(fields)
    return data


def defaults(fake_db, user_id):
    return sorted(
        doc_id for doc_id, data in fake_db.collection("addresses").docs.items()
        if data.get("userId") == user_id and data.get("isDefault")
    )


class TestAddressRepository:

    def test_add_default_clears_previous_default(self, fake_db):
        repo = AddressRepository()
        first = repo.add("u1", address(isDefault=True))

        second = repo.add("u1", address(isDefault=True, label="Work"))

        assert defaults(fake_db, "u1") == [second]
        assert fake_db.data("addresses", first)["isDefault"] is False

    def test_add_non_default_keeps_existing_default(self, fake_db):
        repo = AddressRepository()
        first = repo.add("u1", address(isDefault=True))

        repo.add("u1", address())

        assert defaults(fake_db, "u1") == [first]

    def test_other_users_are_untouched(self, fake_db):
        repo = AddressRepository()
        other = repo.add("u2", address(isDefault=True))

        repo.add("u1", address(isDefault=True))

        assert defaults(fake_db, "u2") == [other]

    def test_set_default(self, fake_db):
        repo = AddressRepository()
        first = repo.add("u1", address(isDefault=True))
        second = repo.add("u1", address())

        repo.set_default("u1", second)

        assert defaults(fake_db, "u1") == [second]
        assert repo.find_default("u1").id == second
        assert fake_db.data("addresses", first)["isDefault"] is False

    def test_change_to_default(self, fake_db):
        repo = AddressRepository()
        first = repo.add("u1", address(isDefault=True))
        second = repo.add("u1", address())

        repo.change("u1", second, {"isDefault": True, "city": "Mumbai"})

        assert defaults(fake_db, "u1") == [second]
        assert fake_db.data("addresses", second)["city"] == "Mumbai"
        assert fake_db.data("addresses", first)["isDefault"] is False

    def test_find_by_user_lists_default_first(self, fake_db):
        repo = AddressRepository()
        repo.add("u1", address(label="Home"))
        default_id = repo.add("u1", address(isDefault=True, label="Work"))
        repo.add("u2", address())

        addresses = repo.find_by_user("u1")

        assert len(addresses) == 2
        assert addresses[0].id == default_id

    def test_find_for_user_checks_owner(self, fake_db):
        repo = AddressRepository()
        address_id = repo.add("u1", address())

        assert repo.find_for_user("u1", address_id).user_id == "u1"
        assert repo.find_for_user("u2", address_id) is None

    def test_find_default_none(self, fake_db):
        assert AddressRepository().find_default("nobody") is None
