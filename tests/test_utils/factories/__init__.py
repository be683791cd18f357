from tests.test_utils.factories.parsing import ParsedUrlFactory

__all__ = ["ParsedUrlFactory"]
