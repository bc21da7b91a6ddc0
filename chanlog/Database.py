import json, sqlite3, threading, time, typing
from chanlog import Logging, utils

class Table(object):
    def __init__(self, database: "Database"):
        self.database = database

class ModuleSettings(Table):
    def set(self, module: str, setting: str, value: typing.Any):
        self.database.execute(
            "INSERT OR REPLACE INTO module_settings VALUES (?, ?, ?)",
            [module.lower(), setting.lower(), json.dumps(value)])
    def get(self, module: str, setting: str, default: typing.Any=None):
        value = self.database.execute_fetchone(
            """SELECT value FROM module_settings WHERE
            module=? AND setting=?""",
            [module.lower(), setting.lower()])
        if value:
            return json.loads(value[0])
        return default
    def find(self, module: str, pattern: str
            ) -> typing.List[typing.Tuple[str, typing.Any]]:
        values = self.database.execute_fetchall(
            """SELECT setting, value FROM module_settings WHERE
            module=? AND setting LIKE ? ORDER BY setting""",
            [module.lower(), pattern.lower()])
        return [(setting, json.loads(value)) for setting, value in values]
    def find_prefix(self, module: str, prefix: str
            ) -> typing.List[typing.Tuple[str, typing.Any]]:
        return self.find(module, "%s%%" % prefix)
    def delete(self, module: str, setting: str):
        self.database.execute(
            "DELETE FROM module_settings WHERE module=? AND setting=?",
            [module.lower(), setting.lower()])

class Database(object):
    def __init__(self, log: Logging.Log, location: str):
        self.log = log
        self.location = location
        self.database = sqlite3.connect(self.location,
            check_same_thread=False, isolation_level=None)
        self._cursor: typing.Optional[sqlite3.Cursor] = None
        self._lock = threading.Lock()

        self.make_module_settings_table()

        self.module_settings = ModuleSettings(self)

    def cursor(self) -> sqlite3.Cursor:
        if self._cursor == None:
            self._cursor = self.database.cursor()
        return self._cursor

    def close(self):
        self.database.close()

    def _execute_fetch(self, query: str,
            fetch_func: typing.Callable[[sqlite3.Cursor], typing.Any],
            params: typing.List=[]):
        if not utils.is_main_thread():
            raise RuntimeError("Can't access Database outside of main thread")

        printable_query = " ".join(query.split())
        start = time.monotonic()

        cursor = self.cursor()
        with self._lock:
            cursor.execute(query, params)
            value = fetch_func(cursor)

        total_milliseconds = (time.monotonic() - start) * 1000
        self.log.trace("executed query in %fms: \"%s\" (params: %s)",
            [total_milliseconds, printable_query, params])

        return value
    def execute_fetchall(self, query: str, params: typing.List=[]):
        return self._execute_fetch(query,
            lambda cursor: cursor.fetchall(), params)
    def execute_fetchone(self, query: str, params: typing.List=[]):
        return self._execute_fetch(query,
            lambda cursor: cursor.fetchone(), params)
    def execute(self, query: str, params: typing.List=[]):
        return self._execute_fetch(query, lambda cursor: None, params)

    def has_table(self, table_name: str) -> bool:
        result = self.execute_fetchone("""SELECT COUNT(*) FROM
            sqlite_master WHERE type='table' AND name=?""",
            [table_name])
        return result[0] == 1

    def make_module_settings_table(self):
        if not self.has_table("module_settings"):
            self.execute("""CREATE TABLE module_settings
                (module TEXT, setting TEXT, value TEXT,
                PRIMARY KEY (module, setting))""")
