"""
Errors — типизированные ошибки алгебры векторов и матриц

Все ошибки наследуют GraphmathError и одновременно встроенный класс,
который поймал бы вызывающий код без знания библиотеки:
- ArityError            → ValueError
- ElementIndexError     → IndexError
- DegenerateVectorError → ArithmeticError
- SingularMatrixError   → ArithmeticError

Ни одна операция не восстанавливается внутри себя: ошибка всегда
поднимается синхронно с сообщением, содержащим исходное значение.
"""


class GraphmathError(Exception):
    """Базовый класс ошибок graphmath."""

    pass


class ArityError(GraphmathError, ValueError):
    """
    Входная последовательность короче, чем требует размерность значения.

    Недостающие компоненты никогда не дополняются нулями.
    Лишние компоненты (длиннее N) молча отбрасываются конструктором.
    """

    def __init__(self, type_name: str, expected: int, got: int):
        self.type_name = type_name
        self.expected = expected
        self.got = got
        super().__init__(
            f"{type_name} requires {expected} components, got {got}"
        )


class ElementIndexError(GraphmathError, IndexError):
    """Индекс строки/столбца матрицы вне диапазона [0, N)."""

    pass


class DegenerateVectorError(GraphmathError, ArithmeticError):
    """
    Нормализация вектора нулевой длины.

    Направление нулевого вектора не определено; вместо тихого Inf/NaN
    поднимается явная ошибка. Для sentinel-поведения используйте
    normalize_safe().
    """

    pass


class SingularMatrixError(GraphmathError, ArithmeticError):
    """Обращение матрицы с нулевым (или невалидным) определителем."""

    pass
