class Player:
    def __init__(self, location):
        self.location = location
        self.inventory = []

    def has_item(self, item_id):
        for item in self.inventory:
            if item == item_id:
                return True
        return False

    def add_item(self, item_id):
        self.inventory.append(item_id)

    def move_to(self, room_id):
        # No validation here; the go command checks exits first.
        self.location = room_id

    def to_state(self):
        return {
            'location': self.location,
            'inventory': self.inventory[:],
        }
