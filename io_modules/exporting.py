# io_modules/exporting.py
import os


def export_plot(fig, title, export_type='png', directory=None, folder='preview_plots', overwrite=False):
    """
    Export a Matplotlib Figure to <directory>/<folder>/<title>.<ext>.
    Returns the written path, or None if nothing was written.
    """
    supported_types = {
        'png': '.png',
        'svg': '.svg',
        'pdf': '.pdf',
    }

    export_type = export_type.lower()
    if export_type not in supported_types:
        raise ValueError(f"Unsupported export type '{export_type}'")
    extension = supported_types[export_type]
    if title.lower().endswith(extension):
        title = title[:-len(extension)]
    filename = os.path.join(folder, f"{title}{extension}")

    if directory is None:
        directory = os.getcwd()

    filepath = os.path.join(directory, filename)
    target_dir = os.path.dirname(filepath)
    if not os.path.isdir(target_dir):
        os.makedirs(target_dir)
        print(f"Directory '{target_dir}' created.")

    if os.path.exists(filepath) and not overwrite:
        print(f"File '{filepath}' exists; export skipped (overwrite=False).")
        return None

    fig.savefig(filepath)
    print(f"Plot exported as '{filepath}'")
    return filepath
