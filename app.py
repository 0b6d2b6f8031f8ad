import gradio as gr

from table_normalizer.config import configure_logging
from table_normalizer.handlers import (
    EXPORT_FORMATS,
    SORT_DIRECTIONS,
    SORT_NONE,
    export_table_handler,
    load_table_handler,
    update_view_handler,
)

configure_logging()

# --- UI Definition ---
with gr.Blocks(title="Table Normalizer") as demo:
    gr.Markdown("# Table Normalizer")
    gr.Markdown("Open a CSV, JSON or JSONL file, browse it as one flat table and export it back to CSV or JSON.")

    # State
    table_state = gr.State()
    view_state = gr.State()

    with gr.Row():
        # Left Panel: Input & View controls
        with gr.Column(scale=1):
            gr.Markdown("### 1. Open")
            file_input = gr.File(label="Upload Data File", file_types=[".csv", ".json", ".jsonl"])
            status_msg = gr.Textbox(label="Status", interactive=False)
            file_info = gr.Textbox(label="File Info", interactive=False)

            gr.Markdown("### 2. Search & Sort")
            search_input = gr.Textbox(label="Search", placeholder="Filter rows containing...")
            sort_column = gr.Dropdown(
                label="Sort Column",
                choices=[SORT_NONE],
                value=SORT_NONE,
                interactive=True,
            )
            sort_direction = gr.Radio(choices=SORT_DIRECTIONS, value=SORT_DIRECTIONS[0], label="Sort Direction")

            gr.Markdown("### 3. Export")
            output_format = gr.Radio(choices=EXPORT_FORMATS, value="CSV", label="Output Format")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="exported_data")
            export_btn = gr.Button("Export Data", variant="primary")
            download_output = gr.File(label="Download Result")

        # Right Panel: Table
        with gr.Column(scale=3):
            table_view = gr.Dataframe(label="Data", interactive=False, wrap=True)

    file_input.upload(
        fn=load_table_handler,
        inputs=[file_input],
        outputs=[table_state, view_state, table_view, file_info, sort_column, search_input, status_msg],
    )

    view_inputs = [table_state, search_input, sort_column, sort_direction]
    view_outputs = [view_state, table_view, file_info, status_msg]

    search_input.input(fn=update_view_handler, inputs=view_inputs, outputs=view_outputs)
    sort_column.change(fn=update_view_handler, inputs=view_inputs, outputs=view_outputs)
    sort_direction.change(fn=update_view_handler, inputs=view_inputs, outputs=view_outputs)

    export_btn.click(
        fn=export_table_handler,
        inputs=[table_state, view_state, output_format, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
