import logging
import random
from unittest import TestCase


class TestCaseMixin(TestCase):
    def setUp(self) -> None:
        logging.disable(logging.INFO)
        random.seed(42)

    def tearDown(self) -> None:
        logging.disable(logging.NOTSET)
