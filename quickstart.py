import logging

import electrode as el
from electrode.core import DependencyGraph

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@el.component(el.Singleton)
def settings():
    return {"smtp_host": "localhost", "dsn": "sqlite://"}


@el.component(el.Singleton)
class Database:
    def __init__(self, settings):
        self.dsn = settings["dsn"]


@el.component()
class Mailer:
    def __init__(self, settings, _transport_):
        self.host = settings["smtp_host"]
        self.transport = _transport_


@el.component()
def user_service(database, mailer, retries=3):
    return database, mailer, retries


# Lambdas are annotated from the names before their colon
audit = lambda database, clock: [database, clock]  # noqa: E731
el.decorate(audit)

if __name__ == "__main__":
    for c in [settings, Database, Mailer, user_service, audit]:
        print(f"{c.__qualname__:>16}: {el.get_annotations(c)}")

    graph = DependencyGraph([settings, Database, Mailer, user_service])
    print(graph.build_matrix())

    g = graph.build(sink_source=True)
    g.render("dependency_graph", format="png", cleanup=True)
