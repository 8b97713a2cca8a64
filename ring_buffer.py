DEBUG = False


class RingBuffer(object):
    """A fixed size FIFO of bytes.

    Writes and reads never fail: they move as many bytes as there is room
    (or data) for, and the returned count says how many that was.
    """

    def __init__(self, size):
        if size < 0:
            raise ValueError("Buffer size must not be negative, got {}".format(size))
        self.buffer = bytearray(size)
        self.read_ptr = 0
        self.write_ptr = 0
        self.num_bytes_used = 0

    def __repr__(self):
        return "RingBuffer(read_ptr={}, write_ptr={}, num_bytes_used={}, capacity={})".format(
            self.read_ptr, self.write_ptr, self.num_bytes_used, self.capacity()
        )

    def __len__(self):
        return self.read_available()

    def capacity(self):
        return len(self.buffer)

    def is_full(self):
        return self.capacity() > 0 and self.num_bytes_used == self.capacity()

    def is_empty(self):
        return self.num_bytes_used == 0

    def read_available(self):
        if self.write_ptr > self.read_ptr:
            return self.write_ptr - self.read_ptr
        if self.write_ptr == self.read_ptr:
            return self.capacity() if self.is_full() else 0
        # write pointer has wrapped
        return self.capacity() - self.read_ptr + self.write_ptr

    def write_available(self):
        if self.read_ptr == self.write_ptr:
            return 0 if self.is_full() else self.capacity()
        if self.read_ptr > self.write_ptr:
            return self.read_ptr - self.write_ptr
        return self.capacity() - self.write_ptr + self.read_ptr

    def write(self, bs):
        """Copy as much of ``bs`` as fits; returns the number of bytes taken."""
        available = self.write_available()
        if available == 0:
            return 0

        count = min(len(bs), available)
        if count == 0:
            return 0

        new_write_ptr = self.write_ptr + count
        if new_write_ptr >= self.capacity():
            # split at the end of the buffer and wrap the rest to the start
            split = self.capacity() - self.write_ptr
            new_write_ptr = count - split
            if DEBUG:
                print("2-writing, split at", split, "wrapped end is:", new_write_ptr)
            self.buffer[self.write_ptr :] = bs[:split]
            self.buffer[:new_write_ptr] = bs[split:count]
        else:
            if DEBUG:
                print("1-writing, offset start:", self.write_ptr, "offset end", new_write_ptr)
            self.buffer[self.write_ptr : new_write_ptr] = bs[:count]

        self.write_ptr = new_write_ptr
        self.num_bytes_used += count
        return count

    def peek(self, max_bytes):
        return self._copy_out(self._clamp_read(max_bytes))[0]

    def read(self, max_bytes):
        """Remove and return up to ``max_bytes`` of the oldest bytes."""
        count = self._clamp_read(max_bytes)
        if count == 0:
            return b""

        val, new_read_ptr = self._copy_out(count)
        self.read_ptr = new_read_ptr
        self.num_bytes_used -= count
        return val

    def flush(self):
        # contents are left in place, only the pointers move
        self.read_ptr = 0
        self.write_ptr = 0
        self.num_bytes_used = 0

    def _clamp_read(self, max_bytes):
        return max(0, min(max_bytes, self.read_available()))

    def _copy_out(self, count):
        offset_start = self.read_ptr
        offset_end = offset_start + count
        if offset_end <= self.capacity():
            if DEBUG:
                print("1-read, offset start:", offset_start, "offset end", offset_end)
            val = bytes(self.buffer[offset_start:offset_end])
            if offset_end == self.capacity():
                offset_end = 0
            return val, offset_end

        # data has wrapped, so take the tail then the head of the buffer
        wrapped_end = offset_end - self.capacity()
        if DEBUG:
            print("2-read, offset start:", offset_start, "wrapped end", wrapped_end)
        val = bytes(self.buffer[offset_start:]) + bytes(self.buffer[:wrapped_end])
        return val, wrapped_end


def hex_dump(ring_buffer):
    """Render every storage byte as hex, including bytes already read."""
    return "".join("{:02X} ".format(b) for b in ring_buffer.buffer)


def describe(ring_buffer):
    return "Size:{}, WritePtr:{}, ReadPtr:{}, isFull:{}\n{}".format(
        ring_buffer.capacity(),
        ring_buffer.write_ptr,
        ring_buffer.read_ptr,
        ring_buffer.is_full(),
        hex_dump(ring_buffer),
    )
