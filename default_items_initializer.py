class DefaultItemsInitializer:
    ITEMS = ["aaa", "bbb", "ccc"]
    SELECTED = 1

    def create(self) -> tuple[list[str], int]:
        return list(self.ITEMS), self.SELECTED
