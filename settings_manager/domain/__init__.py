"""Domain layer: exceptions shared by every settings-manager component."""
