"""
Локальный HTTP-ретранслятор для API виртуальной ККМ налоговой службы
"""
