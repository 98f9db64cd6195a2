import matplotlib.pyplot as plt


def _display(symbol):
    return "SPACE" if symbol == " " else symbol


def plot_code_statistics(table, codebook, path=None):
    """
    Draws the symbol frequencies next to the Huffman codeword lengths.

    table: FrequencyTable of the coded text
    codebook: dict symbol -> bit string
    path: where to save the figure, the figure is shown when omitted

    returns
        fig: the matplotlib Figure
    """
    symbols = table.symbols
    labels = [_display(s) for s in symbols]
    positions = range(len(symbols))

    fig = plt.figure(figsize=(max(8, len(symbols) * 0.3), 6))
    plt.suptitle("Huffman code statistics")

    plt.subplot(2, 1, 1)
    plt.bar(positions, [table[s] for s in symbols], color='gray')
    plt.xticks(positions, labels)
    plt.title("Symbol frequencies")
    plt.ylabel("Frequency")

    plt.subplot(2, 1, 2)
    plt.bar(positions, [len(codebook[s]) for s in symbols])
    plt.xticks(positions, labels)
    plt.title("Huffman codeword lengths")
    plt.xlabel("Symbol")
    plt.ylabel("Codeword Length (bits)")

    plt.tight_layout()
    if path is None:
        plt.show()
    else:
        try:
            fig.savefig(path)
        finally:
            plt.close(fig)
    return fig
