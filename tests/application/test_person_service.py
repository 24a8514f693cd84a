"""
Person service tests: CPF uniqueness, validation and queries.
"""
import pytest

from salesapp.domain.exceptions import ConflictError, NotFoundError, UniqueConstraintViolation, ValidationError

VALID_CPF = "11144477735"
OTHER_CPF = "98765432100"


class TestRegisterPerson:
    def test_register_normalizes_cpf(self, person_service):
        person = person_service.register_person(name="  Ana Maria ", cpf="111.444.777-35", address="  ")
        assert person.id == 1
        assert person.name == "Ana Maria"
        assert person.cpf == VALID_CPF
        assert person.address is None

    def test_duplicate_cpf_conflicts(self, person_service):
        person_service.register_person(name="Ana", cpf=VALID_CPF)
        with pytest.raises(ConflictError, match="CPF already registered"):
            person_service.register_person(name="Other", cpf="111.444.777-35")

    @pytest.mark.parametrize("cpf", ["11111111111", "11144477736", "123"])
    def test_invalid_cpf_rejected(self, person_service, cpf):
        with pytest.raises(ValidationError, match="Invalid CPF"):
            person_service.register_person(name="Ana", cpf=cpf)

    def test_empty_name_rejected(self, person_service):
        with pytest.raises(ValidationError):
            person_service.register_person(name="   ", cpf=VALID_CPF)

    def test_store_level_duplicate_becomes_conflict(self, person_service, person_repository):
        # The store sees a duplicate that the pre-check missed (concurrent insert)
        person_repository.find_by_cpf = lambda cpf: None

        def create(person):
            raise UniqueConstraintViolation("cpf", person.cpf)

        person_repository.create = create
        with pytest.raises(ConflictError, match="CPF already registered"):
            person_service.register_person(name="Ana", cpf=VALID_CPF)


class TestUpdatePerson:
    def test_update_keeping_own_cpf(self, person_service, customer):
        updated = person_service.update_person(customer.id, name="Ana M.", cpf=VALID_CPF, address="Rua B")
        assert updated.name == "Ana M."
        assert updated.address == "Rua B"
        assert person_service.get_person(customer.id).name == "Ana M."

    def test_update_to_cpf_of_another_person_conflicts(self, person_service, customer):
        person_service.register_person(name="Carlos", cpf=OTHER_CPF)
        with pytest.raises(ConflictError):
            person_service.update_person(customer.id, name="Ana", cpf=OTHER_CPF)
        assert person_service.get_person(customer.id).cpf == VALID_CPF

    def test_update_missing_person(self, person_service):
        with pytest.raises(NotFoundError):
            person_service.update_person(99, name="X", cpf=VALID_CPF)


class TestQueryPeople:
    def test_list_ordered_by_name_with_filters(self, person_service):
        person_service.register_person(name="Carlos Silva", cpf=OTHER_CPF)
        person_service.register_person(name="Ana Maria", cpf=VALID_CPF)

        assert [p.name for p in person_service.list_people()] == ["Ana Maria", "Carlos Silva"]
        assert [p.name for p in person_service.list_people(name="silva")] == ["Carlos Silva"]
        assert [p.name for p in person_service.list_people(cpf="111.444.777-35")] == ["Ana Maria"]

    def test_get_and_delete(self, person_service, customer):
        assert person_service.get_person(customer.id).cpf == VALID_CPF
        person_service.delete_person(customer.id)
        with pytest.raises(NotFoundError):
            person_service.get_person(customer.id)
        with pytest.raises(NotFoundError):
            person_service.delete_person(customer.id)


class TestCpfDigits:
    def test_non_ascii_digits_cannot_duplicate_a_cpf(self, person_service, customer):
        with pytest.raises(ValidationError, match="Invalid CPF"):
            person_service.register_person(name="Clone", cpf="١١١٤٤٤٧٧٧٣٥")
        assert len(person_service.list_people()) == 1

    def test_cpf_filter_without_digits_matches_nobody(self, person_service, customer):
        assert person_service.list_people(cpf="abc") == []
        assert len(person_service.list_people(cpf="   ")) == 1
