"""
BigMath — Фасад статических методов

Та же поверхность, что и функции модуля bigmath, в форме
BigMath.add(a, b). configure_big_js сохранён как синоним configure.
"""

from bigmath.core.domain.context import configure
from bigmath.core.math.arithmetic import add, divide, mod, multiply, subtract
from bigmath.core.math.number_theory import factorial, gcd, lcm
from bigmath.core.math.ordering import abs, compare, round
from bigmath.core.math.powers import pow, sqrt


class BigMath:
    """Высокоточная арифметика больших чисел"""

    add = staticmethod(add)
    subtract = staticmethod(subtract)
    multiply = staticmethod(multiply)
    divide = staticmethod(divide)
    mod = staticmethod(mod)
    pow = staticmethod(pow)
    sqrt = staticmethod(sqrt)
    factorial = staticmethod(factorial)
    gcd = staticmethod(gcd)
    lcm = staticmethod(lcm)
    compare = staticmethod(compare)
    round = staticmethod(round)
    abs = staticmethod(abs)
    configure = staticmethod(configure)
    configure_big_js = staticmethod(configure)
