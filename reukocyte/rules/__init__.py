"""Line-based layout rules, one module per rule."""