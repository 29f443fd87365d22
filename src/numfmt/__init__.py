"""
numfmt — валидация числовых значений формата N(m.k)

Формат из описи документов, направляемых в налоговый орган в электронном
виде: m — максимум знаков числа (включая знак), k — максимум знаков
дробной части.
"""
