class NotFoundError(Exception):
    """A single-entity operation referenced an id with no matching row."""

    kind = "Entity"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.kind} with id {entity_id} not found")


class MovieNotFound(NotFoundError):
    kind = "Movie"


class DirectorNotFound(NotFoundError):
    kind = "Director"
