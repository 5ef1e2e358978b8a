"""pipework: a graph IR for goroutine-and-channel programs."""
