"""Host adapters that drive the editor outside a plain terminal."""
