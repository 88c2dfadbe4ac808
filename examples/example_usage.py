"""Exemplo: usar a camada de serviços sem passar pelo Flask.

Controllers são só uma camada fina; as regras ficam nos services.
"""

import importlib
import sys

from config import get_settings_module

from src.banco_horas.banco_horas.common.datetime_utils import now_local
from src.banco_horas.banco_horas.container import build_container


def main():
    employee_id = int(sys.argv[1]) if len(sys.argv) > 1 else 1
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    for month in container.balance_service.get_monthly_balance(employee_id, now_local().year):
        row = month.to_dict()
        print(f"{row['month']:<10} dias={row['days']:>2} saldo={row['difference_label']:>10} acumulado={row['running_balance_label']}")


if __name__ == "__main__":
    main()
