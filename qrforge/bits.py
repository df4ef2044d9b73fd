class BitBuffer:
    '''
    Growable sequence of bits, most significant bit first
    '''

    def __init__(self):
        self.bits = []

    def __len__(self):
        return len(self.bits)

    def __repr__(self):
        return 'BitBuffer(%s)' % ''.join(map(str, self.bits))

    def put(self, value, length):
        '''
        Appends the lowest `length` bits of value
        '''

        if length < 0 or value >> length:
            raise ValueError('%d does not fit in %d bits' % (value, length))

        for shift in range(length - 1, -1, -1):
            self.bits.append((value >> shift) & 1)

    def put_bit(self, bit):
        self.bits.append(1 if bit else 0)

    def to_bytes(self):
        '''
        Example: 001010110010101001010101 -> [43, 42, 85]
        '''

        assert len(self.bits) % 8 == 0

        result = []
        for start in range(0, len(self.bits), 8):
            byte = 0
            for bit in self.bits[start:start + 8]:
                byte = (byte << 1) | bit
            result.append(byte)

        return result
