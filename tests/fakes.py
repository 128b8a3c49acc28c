"""In-memory PokeAPI behind a requests-like session, plus scripted input/rng."""
from pokeduel.data.client import PokeAPIClient

BASE = "https://pokeapi.test/api/v2"


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Serves registered URLs; anything else is a 404."""
    def __init__(self):
        self.routes = {}
        self.calls = []
        self.closed = False

    def add(self, url, payload, status=200):
        self.routes[url] = (status, payload)

    def get(self, url, timeout=None):
        self.calls.append(url)
        status, payload = self.routes.get(url, (404, {"detail": "Not found."}))
        if isinstance(status, Exception):
            raise status
        return FakeResponse(status, payload)

    def close(self):
        self.closed = True


def move_url(name):
    return f"{BASE}/move/{name}/"


def move_payload(mid, name, power, accuracy=100, damage_class="physical", type_="normal", pp=20):
    return {
        "id": mid, "name": name, "accuracy": accuracy, "power": power, "pp": pp,
        "type": {"name": type_}, "damage_class": {"name": damage_class},
    }


def creature_payload(cid, name, move_names):
    return {
        "id": cid, "name": name,
        "moves": [{"move": {"name": n, "url": move_url(n)}} for n in move_names],
    }


class FakeAPI:
    def __init__(self):
        self.session = FakeSession()
        self._next_move_id = 1

    def add_move(self, name, power, **kw):
        payload = move_payload(self._next_move_id, name, power, **kw)
        self._next_move_id += 1
        self.session.add(move_url(name), payload)
        return payload

    def add_creature(self, cid, name, moves):
        """moves: list of (name, power) or (name, power, kwargs)."""
        names = []
        for spec in moves:
            mname, power = spec[0], spec[1]
            kw = spec[2] if len(spec) > 2 else {}
            if move_url(mname) not in self.session.routes:
                self.add_move(mname, power, **kw)
            names.append(mname)
        payload = creature_payload(cid, name, names)
        self.session.add(f"{BASE}/pokemon/{cid}", payload)
        self.session.add(f"{BASE}/pokemon/{name}", payload)
        return payload

    def client(self):
        return PokeAPIClient(BASE, timeout=1.0, session=self.session)


STRONG_MOVES = [
    ("thunder", 110), ("thunderbolt", 90), ("slam", 80), ("quick-attack", 40),
    ("spark", 65), ("thunder-punch", 75), ("thunder-shock", 40),
]


def output_of(console):
    return console.file.getvalue()


def scripted(*answers):
    """input_fn returning the given answers in order."""
    it = iter(answers)
    def _ask(prompt=""):
        return next(it)
    return _ask


class ScriptedRandom:
    """Stands in for random.Random with fixed randint results."""
    def __init__(self, *ints):
        self.ints = list(ints)

    def randint(self, a, b):
        return self.ints.pop(0)

    def randrange(self, n):
        return 0
