def driver_error_code(exc: BaseException) -> str:
    """
    Extrae un código de error legible de una excepción del driver.

    Los ORMs envuelven la excepción original (`orig` en SQLAlchemy, args[0]
    o __context__ en Peewee); se busca el código de Postgres (`pgcode`),
    el nombre de error de SQLite o un errno numérico (MySQL).
    """
    candidates: list[BaseException] = [exc]
    for related in (getattr(exc, "orig", None), exc.__cause__, exc.__context__):
        if isinstance(related, BaseException):
            candidates.append(related)
    if exc.args and isinstance(exc.args[0], BaseException):
        candidates.append(exc.args[0])

    for candidate in candidates:
        for attr in ("pgcode", "sqlite_errorname"):
            code = getattr(candidate, attr, None)
            if code:
                return str(code)
        if candidate.args and isinstance(candidate.args[0], int):
            return str(candidate.args[0])
    return type(exc).__name__
