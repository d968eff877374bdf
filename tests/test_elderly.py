import pytest

from estruturas.elderly import MAX_OVERTAKEN, Category, ServiceQueue, service_order

SEQUENCES = [
    [1, 1, 2, 2, 2, 1, 2],
    [2, 2, 2, 1, 1, 1],
    [1, 2, 1, 2, 2, 2, 2, 1, 2, 2],
    [1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 2],
    [2, 1, 2, 1, 2, 1, 2, 1],
]


def test_worked_example():
    assert service_order([1, 1, 2, 2, 2, 1, 2]) == [3, 4, 1, 2, 5, 7, 6]


def test_worked_example_with_enum():
    categories = [Category.GENERAL, Category.GENERAL, Category.ELDERLY,
                  Category.ELDERLY, Category.ELDERLY, Category.GENERAL, Category.ELDERLY]
    assert service_order(categories) == service_order([1, 1, 2, 2, 2, 1, 2])


def test_only_general_customers_keep_arrival_order():
    categories = [Category.GENERAL] * 6
    assert service_order(categories) == list(range(1, 7))


@pytest.mark.parametrize("categories", SEQUENCES)
def test_service_numbers_match_positions(categories):
    queue = ServiceQueue()
    for category in categories:
        queue.enqueue(category)
    assert [c.service for c in queue] == list(range(1, len(categories) + 1))
    assert len(queue) == len(categories)


@pytest.mark.parametrize("categories", SEQUENCES)
def test_general_customers_overtaken_at_most_limit(categories):
    queue = ServiceQueue()
    for category in categories:
        queue.enqueue(category)
    general = [c for c in queue if c.category is Category.GENERAL]
    assert all(c.overtaken <= MAX_OVERTAKEN for c in general)
    assert [c.arrival for c in general] == sorted(c.arrival for c in general)


@pytest.mark.parametrize("categories", SEQUENCES)
def test_order_is_a_permutation_of_arrivals(categories):
    order = service_order(categories)
    assert sorted(order) == list(range(1, len(categories) + 1))


def test_enqueue_returns_customer_with_arrival_number():
    queue = ServiceQueue()
    first = queue.enqueue(1)
    second = queue.enqueue(2)
    assert first.arrival == 1
    assert second.arrival == 2
    assert second.category is Category.ELDERLY


def test_dequeue_serves_front():
    queue = ServiceQueue()
    for category in [1, 1, 2]:
        queue.enqueue(category)
    expected = service_order([1, 1, 2])
    served = [queue.dequeue().arrival for _ in range(3)]
    assert served == expected
    assert len(queue) == 0


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        ServiceQueue().dequeue()


def test_invalid_category_raises():
    with pytest.raises(ValueError):
        ServiceQueue().enqueue(3)