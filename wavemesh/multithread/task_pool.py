# wavemesh/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# Позволяет распределять независимые грани модели (индексы,
# триангуляция, касательные) по нескольким потокам.
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor

class TaskPool:
    """Пул готового количества потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self._shutdown = False

    def map(self, fn, items):
        """
        Выполнить fn над каждым элементом; результаты – в порядке items.
        Первое исключение (в порядке items) пробрасывается вызывающему.
        """
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        futures = [self.executor.submit(fn, item) for item in items]
        return [future.result() for future in futures]

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
