"""Banco de Horas package.

Feature modules (holidays, schedules, records, balance, sync) with a thin
Flask controller layer over service/repository layers. The classification
engine in ``records`` is the single source of truth for day outcomes.
"""
