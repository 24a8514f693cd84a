"""
CPF checksum tests.
"""
import pytest

from salesapp.domain.cpf import is_valid_cpf, normalize_cpf, only_digits


class TestValidCpf:
    @pytest.mark.parametrize("cpf", ["11144477735", "98765432100", "12345678909", "52998224725"])
    def test_known_valid_numbers_accept(self, cpf):
        assert is_valid_cpf(cpf)

    def test_punctuation_is_ignored(self):
        assert is_valid_cpf("111.444.777-35")
        assert is_valid_cpf(" 529.982.247-25 ")


class TestInvalidCpf:
    @pytest.mark.parametrize("digit", "0123456789")
    def test_all_identical_digits_reject(self, digit):
        assert not is_valid_cpf(digit * 11)

    def test_altered_first_check_digit_rejects(self):
        assert not is_valid_cpf("11144477725")

    def test_altered_second_check_digit_rejects(self):
        assert not is_valid_cpf("11144477736")

    @pytest.mark.parametrize("cpf", ["1114447773", "111444777350", "111.444.777-3"])
    def test_wrong_length_rejects(self, cpf):
        assert not is_valid_cpf(cpf)

    @pytest.mark.parametrize("cpf", ["", "   ", None, "abc.def.ghi-jk"])
    def test_blank_or_non_numeric_rejects(self, cpf):
        assert not is_valid_cpf(cpf)


class TestNormalize:
    def test_only_digits(self):
        assert only_digits("111.444.777-35") == "11144477735"

    def test_normalize_returns_digits(self):
        assert normalize_cpf("111.444.777-35") == "11144477735"

    def test_normalize_invalid_raises(self):
        with pytest.raises(ValueError, match="Invalid CPF"):
            normalize_cpf("11111111111")


class TestNonAsciiDigits:
    ARABIC_INDIC = "١١١٤٤٤٧٧٧٣٥"
    FULLWIDTH = "１１１４４４７７７３５"

    @pytest.mark.parametrize("cpf", [ARABIC_INDIC, FULLWIDTH])
    def test_other_scripts_reject(self, cpf):
        assert not is_valid_cpf(cpf)
        with pytest.raises(ValueError):
            normalize_cpf(cpf)

    def test_only_ascii_digits_are_kept(self):
        assert only_digits("111.444.777-3٥") == "1114447773"
