"""Character, memory, string, linked list and output helpers."""