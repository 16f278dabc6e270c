"""
Тесты для Ordinal Suffixer

Проверяет:
1. Таблицу суффиксов по последней цифре
2. Исключения 11/12/13 (в том числе 111, 112, 113)
3. Отрицательные числа
4. Отказ для не-int
"""

from decimal import Decimal

import pytest

from number_human.formatters.ordinal import number_to_ordinal, ordinal_suffix


class TestNumberToOrdinal:
    """Тесты для number_to_ordinal"""

    @pytest.mark.parametrize(
        "number, expected",
        [
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (23, "23rd"),
            (100, "100th"),
            (101, "101st"),
            (111, "111th"),
            (112, "112th"),
            (113, "113th"),
            (46, "46th"),
            (442, "442nd"),
            (4001, "4001st"),
            (0, "0th"),
        ],
    )
    def test_table(self, number: int, expected: str) -> None:
        assert number_to_ordinal(number) == expected

    @pytest.mark.parametrize(
        "number, expected",
        [
            (-1, "-1st"),
            (-2, "-2nd"),
            (-3, "-3rd"),
            (-11, "-11th"),
            (-12, "-12th"),
            (-112, "-112th"),
            (-21, "-21st"),
        ],
    )
    def test_negative_numbers(self, number: int, expected: str) -> None:
        """Суффикс выбирается по модулю, а не по Python %"""
        assert number_to_ordinal(number) == expected

    def test_big_integer(self) -> None:
        assert number_to_ordinal(10**20 + 2) == f"{10**20 + 2}nd"

    @pytest.mark.parametrize("value", [1.0, Decimal("1"), "1", None, True])
    def test_non_integer_rejected(self, value) -> None:
        with pytest.raises(TypeError, match="expects an integer"):
            number_to_ordinal(value)

    def test_deterministic(self) -> None:
        assert number_to_ordinal(442) == number_to_ordinal(442)


class TestOrdinalSuffix:
    def test_suffix_only(self) -> None:
        assert ordinal_suffix(1) == "st"
        assert ordinal_suffix(13) == "th"
        assert ordinal_suffix(1013) == "th"
        assert ordinal_suffix(1022) == "nd"
