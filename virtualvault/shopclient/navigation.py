class Navigator:
    """
    Навигация клиента: текущий путь и история переходов.

    intended - путь, который запомнила защищённая страница перед
    переходом на /login; его забирает форма входа после успеха.
    """

    def __init__(self, intended=None, start='/'):
        self.intended = intended
        self.history = [start]

    @property
    def location(self):
        return self.history[-1]

    def navigate(self, path):
        self.history.append(path)
        return path

    def consume_intended(self, default='/'):
        target = self.intended or default
        self.intended = None
        return target
