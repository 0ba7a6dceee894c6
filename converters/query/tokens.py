class QueryNormalizer:
    """Turn raw query text into an ordered list of lowercase tokens.

    Tokens are split on runs of whitespace, empty ones are dropped.
    Order and repeats are preserved, as repeated tokens are scored repeatedly.
    """

    def tokenize(self, query: str) -> list[str]:
        if not query:
            return []
        return query.lower().strip().split()


if __name__ == "__main__":
    from tclogger import logger

    normalizer = QueryNormalizer()
    query = "  React   react Tutorial "
    logger.note(f"> Tokenize: [{query}]")
    logger.mesg(normalizer.tokenize(query))

    # python -m converters.query.tokens
