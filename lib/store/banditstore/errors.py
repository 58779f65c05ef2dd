from banditcore.errors import BanditError


class PersistenceError(BanditError):
    detail = "policy state could not be read or written"


class StateNotFoundError(PersistenceError):
    detail = "no policy state has been saved; run training first"


class DataSourceError(BanditError):
    detail = "training records could not be fetched"
