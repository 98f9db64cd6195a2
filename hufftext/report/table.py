import csv

HEADER = ["Symbol", "Frequency", "Code"]


def write_csv(path, codebook, table, stats):
    """
    Writes the code table followed by the size comparison.

    path: destination of the CSV file
    codebook: dict symbol -> bit string
    table: FrequencyTable the codebook was built from
    stats: CompressionStats of the encoded text
    """
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        for symbol in table.symbols:
            writer.writerow([symbol, table[symbol], codebook[symbol]])
        writer.writerow([])
        writer.writerow(["Original size (bytes)", stats.original_bytes])
        writer.writerow(["Compressed size (bytes)", stats.encoded_bytes])
        writer.writerow(["Comparison (%)", stats.ratio_text()])
    return path
