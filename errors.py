class AggregationFailure(Exception):
    """A collaborator call failed while building the leaderboard."""


class DocumentNotFound(Exception):
    def __init__(self, collection: str, document_id: str):
        super().__init__(f"{collection}/{document_id} does not exist")
        self.collection = collection
        self.document_id = document_id


class ProgressNotFound(Exception):
    pass


class ChallengeNotSolved(Exception):
    pass
